from setuptools import setup, find_packages

setup(
    name="ackack",
    version="0.1.0",
    author="ackack.io",
    description="Async client for the ackack.io uptime monitoring API",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/ackack-io/ackack-python",
    packages=find_packages(include=['ackack', 'ackack.*']),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=[
        "httpx",
        "pydantic>=2",
        "tenacity>=8.3",
        "structlog",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)
