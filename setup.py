from setuptools import setup, find_packages

setup(
    name='gexf-codec',
    version='1.0.0',
    description='GEXF 1.2 document model and XML encoder/decoder',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'lxml>=6.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    python_requires='>=3.8',
)
