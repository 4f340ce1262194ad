from setuptools import setup, find_packages

setup(
    name="polyconst",
    version="1.0",
    description="Exact reconstruction of the constant term of a polynomial from base-encoded shares",
    long_description=("Reconstructs the constant term of a polynomial of degree k-1 from k sample points whose "
                      "values are given as digit strings in bases 2 to 36, using exact rational arithmetic "
                      "(Vandermonde system, Gaussian elimination) over arbitrary-precision integers"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["polyconst", "polyconst.*"]),
    install_requires=["numpy", "sympy", "matplotlib"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    entry_points={"console_scripts": ["polyconst=polyconst.__main__:start_from_command_line"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["polynomial interpolation", "exact arithmetic", "rational numbers", "vandermonde", "secret sharing"],
    zip_safe=False,
)
