from setuptools import find_packages, setup

package_name = 'geowkb'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'setuptools',
        'cbor2>=5.6.0',
        'numpy>=1.24.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'shapely>=2.0',
        ],
    },
    zip_safe=True,
    maintainer='geowkb Contributors',
    maintainer_email='your-email@example.com',
    description='Well-Known Binary (WKB) encoder for simple feature geometries',
    license='MIT',
    tests_require=['pytest', 'shapely>=2.0'],
)
