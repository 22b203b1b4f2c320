from setuptools import setup, find_packages

setup(
    name="martian-robots",
    version="0.2.0",
    package_dir={"": "src"},
    description="Martian robots mission simulator with scent memory",
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "rich",
        "rich-click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "martian=martian.cli:main",
        ],
    },
)
