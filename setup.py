# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="blueprint-folders",
    version="0.1.0",
    description="Create folder trees from indented text outlines",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["blueprint*"]),
    package_data={
        "blueprint": ["interface/locales/*.json", "templates/*.txt"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'blueprint=blueprint.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
