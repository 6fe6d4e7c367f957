"""
Setup configuration for nibbler package.
"""

from setuptools import setup, find_packages

setup(
    name="nibbler",
    version="0.1.0",
    description="Modal terminal hex editor with vim-like key commands",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "windows-curses>=2.4.1; platform_system == 'Windows'",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "nibbler=nibbler.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console :: Curses",
        "Intended Audience :: Developers",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Debuggers",
        "Topic :: Utilities",
    ],
)
