from glob import glob
from setuptools import setup


setup(
    name='infix',
    version='0.1.0',
    description='Infix arithmetic calculator (shunting yard + RPN)',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['infix'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
