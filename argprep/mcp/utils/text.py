from importlib import resources


def get_file_text(path: str) -> str:
    """Return the text of a file under the argprep.mcp package."""
    return (resources.files("argprep.mcp") / path).read_text()
