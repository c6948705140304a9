from setuptools import setup, find_packages

setup(
    name="bigfraction",
    version="1.0",
    description="Immutable arbitrary-precision fractions with exact arithmetic",
    long_description=("Immutable fractions of whole numbers of arbitrary precision, with exact arithmetic, "
                      "a total order, a canonical text form and lossless conversion to Fraction, "
                      "python-flint and sympy rationals"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["python-flint", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["fraction", "rational", "exact arithmetic", "arbitrary precision"],
    zip_safe=False,
)
