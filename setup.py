import os

from setuptools import find_packages, setup

BASE_PATH = os.path.abspath(os.path.dirname(__file__))

if __name__ == "__main__":
    setup(
        name="prefix-trie",
        version=open(os.path.join(BASE_PATH, "prefix_trie", "version.txt")).read().strip(),
        license="MIT",
        description="A character trie for word counting and hex color lookups",
        long_description=open(os.path.join(BASE_PATH, "README.md")).read(),
        long_description_content_type="text/markdown",
        install_requires=open(os.path.join(BASE_PATH, "requirements.txt")).readlines(),
        extras_require={"test": ["pytest"]},
        python_requires=">=3.7",
        include_package_data=True,
        zip_safe=False,
        packages=find_packages(include=["prefix_trie", "prefix_trie.*"]),
        entry_points={
            "console_scripts": [
                "prefix-trie = prefix_trie.cli:main",
            ],
        },
        classifiers=[
            "Intended Audience :: Developers",
            "Topic :: Text Processing :: Indexing",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3 :: Only",
            "Operating System :: OS Independent",
        ],
    )
