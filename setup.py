from setuptools import setup, find_packages

setup(
    name='strapictl',
    version='0.1.0',
    packages=find_packages(exclude=['*.tests']),
    include_package_data=True,
    install_requires=[
        'typer',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'strapictl=strapictl.cli:app'
        ]
    },
    description='CLI for installing plugins into Strapi projects',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
