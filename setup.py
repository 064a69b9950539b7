from setuptools import setup, find_packages

setup(
   name="entigen",
   version="0.1",
   package_dir={"": "src"},
   packages=find_packages(where="src"),
   include_package_data=True,
   package_data={"entigen.generators": ["templates/*/*.tpl", "templates/*/*.j2"]},
   python_requires=">=3.10",
   install_requires=[
       "jinja2>=3.0",
       "pydantic>=2.0",
       "pyyaml>=6.0",
   ],
   extras_require={
       "test": ["pytest>=7.0"],
   },
   entry_points={
       "console_scripts": [
           "entigen=entigen.generate_code:main",
       ],
   },
)
