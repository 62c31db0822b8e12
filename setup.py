# setup.py
from setuptools import setup, find_packages

setup(
    name="objscene",
    version="1.0.0",
    description="OBJ/MTL scene import into per-material triangle meshes",
    packages=find_packages(include=["objscene", "objscene.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["objscene-info=objscene.__main__:main"],
    },
)
