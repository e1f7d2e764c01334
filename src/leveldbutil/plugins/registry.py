"""Decoder registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from pydantic import ValidationError

from leveldbutil.application.ports import Decoder
from leveldbutil.errors import DecoderPluginError
from leveldbutil.plugins.builtins import HexDumpDecoder
from leveldbutil.schemas import DecoderResolutionConfig

logger = logging.getLogger(__name__)

DEFAULT_DECODER = HexDumpDecoder.name


class DecoderRegistry:
    """Registry for storage file decoders."""

    def __init__(self) -> None:
        self._decoders: dict[str, Decoder] = {}

    def register(self, decoder: Decoder) -> None:
        """Register decoder instance by unique name.

        Parameters
        ----------
        decoder : Decoder
            Decoder instance to register. A later registration replaces an
            earlier one with the same name.

        Raises
        ------
        DecoderPluginError
            If the decoder does not provide a valid name or ``decode``.
        """
        name = getattr(decoder, "name", "").strip()
        if not name:
            raise DecoderPluginError("Decoder must define a non-empty 'name'.")
        if not callable(getattr(decoder, "decode", None)):
            raise DecoderPluginError(f"Decoder '{name}' must define decode().")
        if name in self._decoders:
            logger.debug("replacing decoder %s", name)
        self._decoders[name] = decoder

    def names(self) -> list[str]:
        """Return registered decoder names, sorted."""
        return sorted(self._decoders.keys())

    def get(self, name: str) -> Decoder:
        """Get decoder by name.

        Raises
        ------
        DecoderPluginError
            If no decoder is registered under ``name``.
        """
        try:
            return self._decoders[name]
        except KeyError as exc:
            raise DecoderPluginError(
                f"Unknown decoder '{name}'. Available decoders: {', '.join(self.names())}"
            ) from exc

    def resolve(self, decoder_name: str | None = None) -> Decoder:
        """Resolve a decoder, falling back to the built-in default.

        Raises
        ------
        DecoderPluginError
            If the name is blank or unknown.
        """
        if decoder_name is None:
            decoder_name = DEFAULT_DECODER
        try:
            payload = DecoderResolutionConfig(decoder_name=decoder_name)
        except ValidationError as exc:
            raise DecoderPluginError(f"Invalid decoder selection: {exc}") from exc
        return self.get(payload.decoder_name)

    def load_module(self, module_or_path: str) -> list[str]:
        """Load decoders from module name or file path.

        .. warning::
            This executes code from the specified module. Only load decoders
            from trusted sources.

        Returns
        -------
        list[str]
            Names the module registered or replaced, sorted.

        Raises
        ------
        DecoderPluginError
            If the module cannot be imported, fails while registering, or
            registers no decoder at all.
        """
        before = dict(self._decoders)
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)
        added = sorted(
            name for name, decoder in self._decoders.items() if before.get(name) is not decoder
        )
        if not added:
            raise DecoderPluginError(f"Decoder module '{module_or_path}' registered no decoders.")
        logger.debug("loaded decoder module %s: %s", module_or_path, ", ".join(added))
        return added


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Parameters
    ----------
    module_or_path : str
        Python module path or local ``.py`` file path.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    DecoderPluginError
        If the module cannot be found or raises while it is executed.
    """
    candidate = Path(module_or_path)
    if not candidate.exists():
        try:
            return importlib.import_module(module_or_path)
        except Exception as exc:
            raise DecoderPluginError(
                f"Unable to import decoder module '{module_or_path}': {exc}"
            ) from exc

    spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
    if spec is None or spec.loader is None:
        raise DecoderPluginError(f"Unable to load decoder module from {candidate}.")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise DecoderPluginError(
            f"Decoder module {candidate} failed to load: {type(exc).__name__}: {exc}"
        ) from exc
    return module


def _register_from_module(module: ModuleType, registry: DecoderRegistry) -> None:
    """Register decoder definitions found in ``module``.

    Supported contracts, in order: ``register_decoders(registry)``,
    a ``DECODERS`` iterable, or a single ``DECODER``.
    """
    module_name = getattr(module, "__name__", repr(module))
    hook = getattr(module, "register_decoders", None)
    if hook is not None:
        try:
            hook(registry)
        except DecoderPluginError:
            raise
        except Exception as exc:
            raise DecoderPluginError(
                f"register_decoders() in '{module_name}' failed: {type(exc).__name__}: {exc}"
            ) from exc
        return

    decoders_obj = getattr(module, "DECODERS", None)
    if decoders_obj is not None:
        if isinstance(decoders_obj, (str, bytes)) or not isinstance(decoders_obj, Iterable):
            raise DecoderPluginError(f"DECODERS in '{module_name}' must be an iterable of decoders.")
        for decoder in decoders_obj:
            registry.register(decoder)
        return

    decoder_obj = getattr(module, "DECODER", None)
    if decoder_obj is not None:
        registry.register(decoder_obj)
        return

    raise DecoderPluginError(
        "Decoder module must expose register_decoders(registry), DECODERS, or DECODER."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> DecoderRegistry:
    """Create a registry holding the built-in decoder plus ``extra_modules``."""
    registry = DecoderRegistry()
    registry.register(HexDumpDecoder())
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
