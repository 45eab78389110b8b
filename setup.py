"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='patter-lang',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.0.1',
	packages=['patter', "patter.adapters", ],
	entry_points={
		'console_scripts': ["patter = patter.cmdline:main"],
	},
	license='MIT',
	description='A tiny scripting language for linear control scripts that listen to the keyboard',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
		"pygame>=2.4.0",
	]
)
