import os

from setuptools import find_packages, setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


long_description = read("README.md") if os.path.isfile("README.md") else ""

setup(
    name="balancer-v3-dex-screener-adapter",
    version="1.0.0",
    description="DEX Screener adapter for Balancer V3 pools",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*"]),
    package_data={
        "balancerv3adapter": ["chains_config.json", "service/ERC20.json"],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
    ],
    keywords="balancer dexscreener ethereum",
    python_requires=">=3.10,<4",
    install_requires=read("requirements.txt").strip().split("\n"),
    extras_require={
        "dev": [
            "pytest>=7.4",
            "httpx>=0.25",
        ],
    },
    entry_points={
        "console_scripts": [
            "balancerv3adapter=balancerv3adapter.cli:cli",
        ],
    },
)
