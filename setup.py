# setup.py
from setuptools import setup, find_packages

setup(
    name="page_auditor",
    version="0.1.0",
    description="PageAuditor: скриншоты, ошибки консоли и оценка качества страниц сайта в headless Chromium",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"page_auditor": ["templates/*.j2"]},
    install_requires=[
        "playwright>=1.40",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
        "beautifulsoup4>=4.12",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "aiohttp>=3.9",
        ],
    },
    entry_points={
        "console_scripts": [
            "page-auditor=page_auditor.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
