from setuptools import setup, find_packages

# Read dependencies from requirements.txt
with open("requirements.txt") as f:
    required = [line.strip() for line in f.read().splitlines() if line.strip() and not line.startswith("#")]

setup(
    name="lingodetect",
    version="0.1.0",
    packages=find_packages(include=["lingodetect", "lingodetect.*"]),
    package_data={"lingodetect": ["data/models/*.json"]},
    include_package_data=True,
    install_requires=required,  # Load dependencies from requirements.txt
    extras_require={"test": ["pytest"]},
    description="LingoDetect detects the natural language of a text from its writing system and character n-gram statistics.",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
