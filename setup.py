from setuptools import find_packages, setup

setup(
    name="option-lattice",
    version="0.1.0",
    description="Binomial lattice and Black-Scholes pricing for vanilla and nested options",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.23",
        "pandas>=1.5",
        "scipy>=1.10",
        "numba>=0.57",
        "pytest>=7.0",
    ],
    extras_require={
        "app": [
            "streamlit>=1.22",
            "plotly>=5.0",
        ],
        "docs": [
            "matplotlib>=3.7",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    include_package_data=True,
)
