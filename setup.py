# setup.py
from setuptools import setup, find_packages

setup(
    name="rotalog",
    version="1.0.0",
    description="File-based logging with level filtering, size-triggered rotation and locked appends",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rotalog=rotalog.interface.cli.app:main',  # Append an entry from shell scripts
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
