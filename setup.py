from glob import glob
from setuptools import setup


setup(
    name='formulaparser',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='Infix formula calculator (shunting-yard to RPN)',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['formulaparser'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
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
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
