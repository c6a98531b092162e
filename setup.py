from setuptools import setup, find_packages

setup(
    name="line-transforms",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "pyyaml",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "line-transforms=linetransforms.__main__:main",
        ],
    },
    python_requires=">=3.8",
    description="Word respelling and \\circle coordinate swapping line transformers",
)
