import re

from setuptools import find_packages, setup


with open("pymat3/_version.py", "rb") as fh:
    version_text = fh.read().decode()
    VERSION = re.search(r"__version__ = \"(.*?)\"", version_text).group(1)


runtime_deps = [
    "numpy",
]

extras_require = {
    "dev": [
        "black",
        "flake8",
        "flake8-black",
        "pep8-naming",
        "pytest",
        "setuptools",
        "wheel",
        "twine",
    ],
    "tests": [
        "pytest",
    ],
}


setup(
    name="pymat3",
    version=VERSION,
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8.0",
    install_requires=runtime_deps,
    extras_require=extras_require,
    license="BSD 2-Clause",
    description="A fixed-size 3x3 matrix value type",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    zip_safe=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    entry_points={
        "console_scripts": [
            "pymat3 = pymat3.__main__:main",
        ],
    },
)
