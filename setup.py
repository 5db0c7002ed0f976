from setuptools import find_packages, setup

setup(
    name="signals-ssr",
    version="0.1.0",
    description="Server-side rendering of signal-based components with hydration markers",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"signals_ssr.server": ["templates/*.html"]},
    install_requires=[
        "starlette>=0.37",
        "jinja2>=3.1",
        "uvicorn>=0.29",
        "rich>=13.0",
        "rich-click>=1.7",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27",
        ],
    },
    entry_points={
        "console_scripts": [
            "signals-ssr=signals_ssr.cli.main:cli",
        ],
    },
    zip_safe=False,
)
