from setuptools import find_packages, setup

setup(
    name="slack-emoji-sdk",
    version="0.1.0",
    description="Async client for Slack's web emoji management routes",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.5",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "pytest-asyncio>=0.23",
        ],
    },
)
