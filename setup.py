import os
import re

from setuptools import setup


def get_version():
    module_init = 'inputplumber/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    with open(module_init) as f:
        return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]', f.read()).group(1)


setup(name='inputplumber-client',
      version=get_version(),
      description='D-Bus client for virtual gamepads managed by InputPlumber',
      url='https://github.com/ShadowBlip/InputPlumber',
      license='LGPL',
      platforms='Linux',
      packages=['inputplumber', 'inputplumber.client', 'inputplumber.client.commands'],
      python_requires='>=3.10',
      entry_points={
          'console_scripts': [
              'inputplumber = inputplumber.client.main:cli_entry',
          ]
      },
      install_requires=['colorlog', 'dbus-fast', 'ruamel.yaml', 'wrapt'],
      extras_require={
          'test': ['pytest'],
      },
      keywords='inputplumber gamepad dbus controller',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Environment :: Console',
          'Intended Audience :: Developers',
          'Intended Audience :: End Users/Desktop',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: System :: Hardware :: Hardware Drivers'
      ])
