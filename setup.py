from setuptools import setup, find_packages
import os
import re

def get_metadata():
    metadata = {}
    init_path = os.path.join("say", "__init__.py")
    with open(init_path, "r", encoding="utf-8") as f:
        content = f.read()
        for field in ["version", "app_name", "description", "author", "license"]:
            match = re.search(fr"__{field}__\s*=\s*['\"]([^'\"]+)['\"]", content)
            if match:
                metadata[field] = match.group(1)
    return metadata

meta = get_metadata()

setup(
    name=meta.get("app_name", "say-cli"),
    version=meta.get("version", "0.1"),
    description=meta.get("description", ""),
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author=meta.get("author", ""),
    packages=find_packages(exclude=["tests*", "docs*"]),
    install_requires=[
        "python-dotenv",
        "rich",
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    license=meta.get("license", "MIT"),
    python_requires='>=3.10',
)
