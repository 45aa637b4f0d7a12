from basen import __version__
import platform
import importlib.metadata


def basen_version() -> dict[str, str]:
    return {
        "basen": __version__,
        "python": platform.python_version(),
        "opentelemetry-api": importlib.metadata.version("opentelemetry-api"),
        "opentelemetry-sdk": importlib.metadata.version("opentelemetry-sdk")
    }
