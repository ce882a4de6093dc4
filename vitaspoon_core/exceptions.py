"""Excepciones del core de VitaSpoon."""


class VitaSpoonError(Exception):
    """Error base del paquete."""
    pass


class ProviderError(VitaSpoonError):
    """
    Falla de un proveedor de IA (red, HTTP no-2xx, cuota, JSON inválido).

    La cadena de respaldo la captura, la registra y excluye al proveedor.
    """

    def __init__(self, provider: str, message: str):
        super().__init__(f"[{provider}] {message}")
        self.provider = provider


class ProviderNotConfiguredError(ProviderError):
    """El proveedor no tiene API key configurada."""
    pass


class ProviderResponseError(ProviderError):
    """La respuesta del proveedor no contiene una receta utilizable."""
    pass
