import builtins

import setuptools

builtins.__RECTANGLES_SETUP__ = True
import rectangles


def setup_package():
    with open("README.md", "r", encoding="utf-8") as f:
        readme = f.read()

    setuptools.setup(
        name="rectangles",
        version=rectangles.__version__,
        packages=setuptools.find_packages(exclude=["tests"]),
        license="BSD",
        description="Build a list of axis-aligned rectangles and scale them about their midpoint",
        long_description=readme,
        long_description_content_type="text/markdown",
        python_requires=">=3.8",
        classifiers=[
            "Intended Audience :: Developers",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "License :: OSI Approved",
            "Topic :: Scientific/Engineering :: Mathematics",
        ],
        entry_points={
            "console_scripts": ["rectangles = rectangles.cmdline:run_session"]
        },
        install_requires=[
            'typing_extensions;python_version<"3.11"',
            "fsspec>=2024.12.0",
            "fsspec<=2025.3.0; python_version <= '3.8'",  # see https://github.com/fsspec/filesystem_spec/issues/1816
        ],
        extras_require={
            "test": [
                "pytest>=6.2.5",
            ],
            "development": ["pre-commit==2.6.0", "black==22.3.0"],
        },
    )


if __name__ == "__main__":
    setup_package()

    del builtins.__RECTANGLES_SETUP__
