from setuptools import setup, find_packages

setup(
    name="advent_solver",
    version="0.1.0",
    packages=find_packages(include=["advent_solver", "advent_solver.*"]),
    package_data={"advent_solver": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "advent_solver=advent_solver.scripts.run_solver:main",
        ]
    },
)
