# setup.py
from setuptools import setup, find_packages

with open('requirements.txt') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name='lotto_hub_engine',
    version='1.0.0',
    packages=find_packages(include=['lotto_service', 'lotto_service.*']),
    python_requires='>=3.10',
    description='Scraper/normalizer API serving the latest lottery draws as uniform JSON records.',
    long_description='This package contains the FastAPI server, the per-game adapters and the field extraction layer.',
    install_requires=requirements,
    extras_require={
        'test': [
            'pytest>=7.4',
            'pytest-asyncio>=0.23',
            'respx>=0.21',
            'asgi-lifespan>=2.1',
        ],
    },
    entry_points={
        'console_scripts': [
            'lotto-hub=lotto_service.run_api:main',
        ],
    },
    include_package_data=True,
)
