import os
import re

import setuptools


def read(fname):
   return open(os.path.join(os.path.dirname(__file__), fname)).read()


# importing the package would require its dependencies at build time
__version__ = re.search(r"__version__ = \"([^\"]+)\"", read("sound_launcher/__init__.py")).group(1)

setuptools.setup(
   name='sound-launcher',
   version=__version__,
   description='Play short audio files through the platform player and stop them early',
   long_description=read('README.md'),
   long_description_content_type="text/markdown",
   license="BSD2",
   keywords="sound player afplay powershell subprocess",
   packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
   install_requires=[
      'krozark-current-platform',
   ],
   extras_require={
      'tests': [
         'pytest',
      ],
   },
   classifiers=[
      "Programming Language :: Python",
      "Programming Language :: Python :: 3",
      "Operating System :: MacOS",
      "Operating System :: Microsoft :: Windows",
    ],
   python_requires='>=3.10',
)
