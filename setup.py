from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "cairosvg>=2.5.2",
    "pillow>=9.3.0",
    "defusedxml>=0.7.1",
    "reportlab>=3.6.0",
]

setup(
    name="svg_studio",
    version="0.1.0",
    description="Validate SVG documents as they are edited and export them as PDF or EPS",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "svg-studio=svg_studio.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
