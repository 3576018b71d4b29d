from setuptools import find_packages, setup

package_name = 'minidrone'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(include=[package_name, f'{package_name}.*']),
    python_requires='>=3.10',
    install_requires=['setuptools'],
    extras_require={'test': ['pytest']},
    zip_safe=False,
    description='Enumeration and diagnostic helpers for the minidrone control stack',
    license='Apache License 2.0',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'minidrone_exmp_lookup_code = '
            'minidrone.example.exmp_lookup_code:main',
        ],
    },
)
