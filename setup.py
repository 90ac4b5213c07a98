from setuptools import setup, find_packages

setup(
    name="payment-rules",
    version="0.1.0",
    description="Payment validation and eligibility rules for real-estate ERP forms",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        'payment_rules': ['local-config.yaml', 'business-config.yaml', 'schemas/*.json'],
    },
    include_package_data=True,
    install_requires=[
        'pyyaml>=6.0',
        'jsonschema>=4.17.0',
        'requests>=2.28.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
)
