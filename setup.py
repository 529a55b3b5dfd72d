from setuptools import find_namespace_packages, setup

VERSION = "0.1.0"

requirements = [line.strip() for line in open("requirements.txt").readlines() if line.strip()]

if __name__ == "__main__":
    setup(
        name="create-ignite",
        version=VERSION,
        packages=find_namespace_packages(
            include=["create_ignite", "create_ignite.*"],
            exclude=["create_ignite.templates.tree", "create_ignite.templates.tree.*"],
        ),
        package_data={"create_ignite.templates": ["tree/**/*"]},
        url="https://github.com/kasimkazmi/create-ignite",
        license="MIT",
        description="CREATE IGNITE - interactive scaffolder for React, Vue, Next.js, Nuxt, Express and Fastify projects",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        classifiers=[
            "Development Status :: 3 - Alpha",
            "Environment :: Console",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
        ],
        install_requires=requirements,
        extras_require={
            "test": ["pytest>=7.4", "pytest-asyncio>=0.23"],
        },
        entry_points={
            "console_scripts": ["create-ignite=create_ignite.cli.main:run_ignite"],
        },
        python_requires=">=3.9",
    )
