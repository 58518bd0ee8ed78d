import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("natural/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="natural",
    version=version,
    description="Arbitrary-precision natural numbers, computed digit by digit.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires=">=3.6",
    extras_require={
        'test': [
            'hypothesis',
            'pytest',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # bignum
            # arbitrary precision
            # long arithmetic
    ],
)
