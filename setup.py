import setuptools

with open('README.md') as f:
    data = f.read()

setuptools.setup(
    name='pyecrecover',
    version='0.1.0',
    license='MIT',
    author='Mohanson',
    author_email='mohanson@outlook.com',
    description='Deterministic secp256k1 signatures with public key recovery',
    packages=['pyecrecover'],
    long_description=data,
    long_description_content_type='text/markdown',
    python_requires='>=3.11',
    install_requires=[
        'ecdsa',
        'pytest',
    ],
)
