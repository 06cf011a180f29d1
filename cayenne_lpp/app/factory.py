# cayenne_lpp/app/factory.py
from __future__ import annotations

import logging
from typing import Optional

import yaml

from cayenne_lpp.app.config import DecoderConfig
from cayenne_lpp.core.errors import CatalogError
from cayenne_lpp.model.loader import TypeCatalogLoader
from cayenne_lpp.protocol.decoder import Decoder


def build_decoder(config: Optional[DecoderConfig] = None, *, logger: Optional[logging.Logger] = None) -> Decoder:
    """
    Construct a fresh Decoder and apply the optional types catalog.

    Every call returns an independent decoder with its own registry.
    """
    config = config or DecoderConfig()
    log = logger or logging.getLogger(__name__)
    decoder = Decoder(logger=logger)

    if not config.types_file:
        return decoder

    loader = TypeCatalogLoader(config.types_file)
    try:
        loader.load()
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        raise CatalogError(
            "Failed to load types catalog.",
            hint=str(e),
            details={"types_file": str(config.types_file)},
        ) from None

    results = loader.apply(decoder.registry)
    rejected = sorted(tid for tid, ok in results.items() if not ok)
    if rejected:
        ids = ", ".join(f"0x{tid:02X}" for tid in rejected)
        if config.strict_catalog:
            raise CatalogError(
                f"Catalog types could not be registered: {ids}",
                hint="Custom types must not reuse a standard or already registered type id.",
                details={"types_file": str(config.types_file), "rejected": rejected},
            )
        log.warning("CATALOG_TYPES_SKIPPED ids=%s", ids)

    log.info(
        "CATALOG_APPLIED file=%s sha256=%s registered=%d",
        config.types_file,
        loader.file_hash,
        len(results) - len(rejected),
    )
    return decoder
