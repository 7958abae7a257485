from setuptools import setup, find_packages

setup(
    name="platformq-governance-actions",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "web3>=6.11.0",
        "eth-account>=0.10.0",
        "eth-utils>=2.1.0",
        "eth-abi>=4.0.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "httpx>=0.24.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.8",
    author="PlatformQ Team",
    description="Governance action adapter for on-chain DAO spaces",
)
