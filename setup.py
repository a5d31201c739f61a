from setuptools import setup

version = "0.1.0"

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="memofib",
    packages=["memofib"],
    version=version,
    license="Apache 2.0",
    description="Naive versus memoized Fibonacci, timed",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords=[
        "MEMOIZATION",
        "FIBONACCI",
        "BENCHMARK",
        "OPEN RECURSION",
    ],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Operating System :: OS Independent",
    ],
    install_requires=["typing-extensions"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["memofib = memofib.cli:run"]},
    python_requires=">=3.7",
)
