"""ADC Loader - locate application default credential files.

This library finds the credential material a client should use when the
caller does not supply one explicitly:
- An explicit override in ``GOOGLE_APPLICATION_CREDENTIALS``
- The OS-specific well-known gcloud file

The located bytes are returned untouched; turning them into a usable
credential object is left to the caller.

Example:
    ```python
    from adc_loader.auth import CredentialsLoader

    loader = CredentialsLoader()
    source = loader.resolve(scope="https://www.googleapis.com/auth/cloud-platform")

    if source.is_found:
        key_json = source.stream.read()
    elif source.is_error:
        source.raise_error()
    ```
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
