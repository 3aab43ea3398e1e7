""" installation script of pomdp_examples """

from setuptools import find_packages, setup

requirements = [
    "numpy",
    "typing_extensions",
    "matplotlib",
]

setup(
    name='pomdp_examples',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    test_suite='tests',
    install_requires=requirements,
    extras_require={'test': ['pytest<9']},
    scripts=[
        'scripts/examples/greedy_tutorial.py',
        'scripts/analysis/plotting.py'
    ]
)
