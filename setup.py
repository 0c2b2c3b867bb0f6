from setuptools import setup, find_packages


setup(name='photomath',
      version='1.0.0',
      description='Dense linear algebra and rotation representations for photogrammetry',
      packages=find_packages(include=['photomath', 'photomath.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['scipy', 'pytest']})
