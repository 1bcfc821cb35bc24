from setuptools import setup, find_packages

setup(
	name="GPT3",
	version="0.1.0",
	description="A typed client for OpenAI's GPT-3 completions, edits, answers, classifications, searches and files api.",
	long_description=open("README.md").read(),
	long_description_content_type="text/markdown",
	packages=find_packages(exclude=["tests", "tests.*"]),
	classifiers=[
		"Programming Language :: Python :: 3",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
	],
	python_requires=">=3.10.12",
	install_requires=[
		"requests",
		"dataclasses-json",
	],
	extras_require={
		"dev": ["pytest"],
	},
)
