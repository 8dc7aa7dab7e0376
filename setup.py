from setuptools import find_packages, setup

setup(
    name='datagram-codec',
    version='1.0.0',
    description='Fixed-layout binary datagram framing for stream and packet transports',
    author='isantolin',
    author_email='',
    packages=find_packages(include=['datagram', 'datagram.*']),
    python_requires='>=3.10',
    install_requires=[
        'msgspec',
        'construct',
        'marshmallow',
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
