from setuptools import find_namespace_packages, setup

# Base requirements for all platforms
install_requires = [
  "loguru>=0.7.2",
  "pydantic>=2.11.0",
]

extras_require = {
  "test": [
    "pytest>=8.0.0",
  ],
}

setup(
  name="mcpxml",
  version="0.0.1",
  description="Streaming parser for XML-wrapped MCP tool calls in LLM text output",
  python_requires=">=3.11",
  package_dir={"": "src"},
  packages=find_namespace_packages(where="src", include=["mcpxml", "mcpxml.*"], exclude=["*.tests", "*.tests.*"]),
  install_requires=install_requires,
  extras_require=extras_require,
  entry_points={"console_scripts": ["mcpxml = mcpxml.main:main"]},
)
