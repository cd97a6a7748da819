from setuptools import find_packages, setup

setup(
    name="link-scraper",
    version="0.1.0",
    description="Format-dispatching link extraction for text, PDF, RTF, image, XML and office documents",
    packages=find_packages(include=["link_scraper", "link_scraper.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Configuration models and result records
        "lxml",  # XML family parsing with recovery
        "PyMuPDF",  # PDF annotations, outline and page text
        "Pillow",  # EXIF and image text metadata
        "python-magic",  # Content-based MIME sniffing
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
