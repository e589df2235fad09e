from setuptools import setup, find_packages

setup(
    name="gootrago",
    version="0.1.0",
    description="Translate text and CSV files with the Google Cloud Translation API",
    packages=find_packages(),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=8.0.0',
        'pandas>=2.0.0',
        'pyyaml>=6.0.0',
        'google-auth>=2.0.0',
        'google-api-core>=2.0.0',
        'google-cloud-translate>=3.0.0',
        'rich>=13.9.0',
    ],
    extras_require={
        'test': ['pytest>=7.0.0'],
    },
    entry_points={
        'console_scripts': [
            'gootrago=gootrago.src.cli.main:main',
        ],
    },
)
