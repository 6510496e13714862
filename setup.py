"""
Build script for the unistr package.
"""

# std
import os

# third-party
from setuptools import Command, find_packages, setup


# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


# Main
# ---------------------------------------------------------------------------- #

setup(
    name='unistr',
    version='0.1.0',
    description='Unicode aware string helpers: casing, segments, wildcard '
                'matching, padding, masking, transliteration and slugs.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    package_data={'unistr': ['config.yaml', 'data/*.yaml']},
    include_package_data=True,
    install_requires=[
        'loguru',
        'more-itertools',
        'decorator',
        'PyYAML',
        'platformdirs',
        'regex',
    ],
    extras_require={'test': ['pytest']},
    cmdclass={'clean': CleanCommand}
)
