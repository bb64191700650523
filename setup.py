from setuptools import setup, find_packages

setup(
    name="zkgadgets",
    version="0.1.0",
    description="Field gadgets emitting rank-1 constraint systems",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "elliptic_curves @ git+https://github.com/nchain-innovation/elliptic_curves_finite_fields.git",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.12",
)
