from glob import glob
from setuptools import setup


setup(
    name='toycalc',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='Four-function pocket calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['toycalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='GPL-3.0-or-later',
)
