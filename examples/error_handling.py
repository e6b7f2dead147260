"""Error handling patterns with recovery hints.

This example demonstrates how to handle common errors and use
the recovery_hint property to provide actionable guidance.
"""

from pydataretriever import (
    ConnFileNotFoundError,
    InvalidConnectionError,
    Retriever,
    RetrieverCommandError,
    RetrieverError,
    RetrieverNotFoundError,
)


retriever = Retriever.from_environment()


# Pattern 1: Bad connection names are rejected before anything runs
def install_checked(name: str, connection: str) -> None:
    """Install with a helpful message for unknown connections."""
    try:
        retriever.install(name, connection)
    except InvalidConnectionError as e:
        print(e)
        print(f"Hint: {e.recovery_hint}")
        raise


# Pattern 2: Server connections need a conn_file
def install_postgres(name: str) -> bool:
    """Install into postgres, reporting a missing conn_file."""
    try:
        retriever.install(name, "postgres")
    except ConnFileNotFoundError as e:
        print(f"Missing credentials file: {e.path}")
        return False
    return True


# Pattern 3: Catch-all for any library error
def fetch_safe(name: str) -> dict | None:
    """Fetch a dataset with comprehensive error handling."""
    try:
        return retriever.fetch(name)
    except RetrieverNotFoundError as e:
        print(f"retriever not installed: {e.executable}")
        return None
    except RetrieverCommandError as e:
        print(f"retriever failed with exit status {e.returncode}")
        print(f"Hint: {e.recovery_hint}")
        return None
    except RetrieverError as e:
        # Catch any other library errors
        print(f"Unexpected error: {e}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Example usage
if __name__ == "__main__":
    # This will print error message and re-raise InvalidConnectionError
    install_checked("iris", "oracle")
