from setuptools import setup, find_packages

setup(
    name="record-decorator",
    version="0.1.0",
    packages=find_packages(),
    author="UMCCR",
    description="Decorators for persisted Django records with validation and lifecycle callbacks",
    python_requires=">=3.8",
    extras_require={
        "test": [
            "factory_boy>=3.2",
            "mockito>=1.4",
            "pytest>=7.0",
            "pytest-django>=4.5",
        ],
    },
    install_requires=[
        "Django>=4.2",
        "django-environ>=0.10",
        "pymysql>=1.0",
    ],
)
