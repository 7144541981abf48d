import glob
import os

from setuptools import find_packages, setup

top_level_modules = [os.path.splitext(os.path.basename(p))[0] for p in glob.glob('src/*.py')]

setup(
    name='lookup_proxy',
    version='0.1.0',
    packages=find_packages(where='src', exclude=['tests', 'tests.*']),
    package_dir={'': 'src'},
    py_modules=top_level_modules,
    include_package_data=True,
    description='Validated, reshaped lookups against PokéAPI and Open Library',
    python_requires='>=3.11',
    install_requires=[
        'fastapi>=0.110',
        'starlette>=0.36',
        'pydantic>=2.5',
        'requests>=2.31',
        'prometheus_client>=0.19',
        'uvicorn>=0.27',
    ],
    extras_require={
        'test': [
            'pytest>=7.4',
            'httpx>=0.25',
        ],
    },
)
