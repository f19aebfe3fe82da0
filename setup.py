from setuptools import find_packages, setup

setup(
    name='dis-codec',
    version='1.0.0',
    description='IEEE 1278.1 Distributed Interactive Simulation PDU codec',
    author='isantolin',
    author_email='',
    packages=find_packages(include=['discodec', 'discodec.*']),
    python_requires='>=3.11',
    install_requires=[
        'construct>=2.10',
        'msgspec>=0.18',
        'marshmallow>=3.18',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
)
