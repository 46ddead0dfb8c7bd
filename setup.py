from setuptools import setup, find_packages

setup(
	name="simple-ea",
	version="0.1.0",
	description="Seeded, lazily evaluated generational evolutionary algorithm engine",
	author="Caleb Kirschbaum",
	packages=find_packages(where="src"),
	package_dir={"": "src"},
	python_requires=">=3.10",
	install_requires=[
		"numpy>=1.24.0",
		"pyyaml>=6.0",
	],
	extras_require={
		"dev": [
			"pytest>=7.4.0",
			"hypothesis>=6.80.0",
			"black>=23.0.0",
			"flake8>=6.0.0",
		],
	},
	classifiers=[
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Science/Research",
		"License :: OSI Approved :: MIT License",
		"Programming Language :: Python :: 3.10",
		"Topic :: Scientific/Engineering :: Artificial Intelligence",
	],
)
