from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "typing-extensions>=4.4.0"
]

# Optional PNG rasterization dependencies
png_requirements = [
    "cairosvg>=2.5.2"
]

# Test dependencies
test_requirements = [
    "pytest>=7.0"
]

setup(
    name="svg_markup",
    version="0.1.0",
    description="Build SVG documents from circles, polylines and text and render them as markup",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "png": png_requirements,
        "test": test_requirements,
        "full": png_requirements
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "svg-markup=svg_markup.main:main",
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
