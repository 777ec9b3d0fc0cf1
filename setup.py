# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- STATE & CONFIG ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",
]

extras_require = {
    # --- TESTS---
    "test": [
        "pytest",
    ],
}

setup(
    name="growmate",
    version="0.1.0",
    description="GrowMate plant-care tracker state core",
    packages=find_packages(include=["growmate", "growmate.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">=3.11",
    entry_points={
        "console_scripts": [
            "growmate=growmate.tracker.main:main",
        ],
    },
)
