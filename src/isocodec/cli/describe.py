"""Field-specification description CLI command."""

from __future__ import annotations

from ..spec.registry import BITMAP_INDEX, MTI_INDEX, FieldSpecRegistry


def describe_registry(registry: FieldSpecRegistry) -> None:
    """Print the registry's field table.

    Args:
        registry: Registry to describe
    """
    print("|" * 7, "isocodec: ISO 8583 Message Codec", "|" * 7)
    data_fields = [index for index in registry if index > BITMAP_INDEX]
    print(f"{len(data_fields)} field{'s' if len(data_fields) != 1 else ''} defined.")
    print(f"Message type: {_mode(registry.mti_descriptor.packed_hex)}")
    print(f"Bitmap: {_mode(registry.bitmap_descriptor.packed_hex)}")
    print()

    print(f"{'-' * 28} Fields {'-' * 28}")
    for index, descriptor in registry.items():
        if index in (MTI_INDEX, BITMAP_INDEX):
            continue

        label = descriptor.label or ""
        layout = f"{descriptor.length_type.value} {descriptor.max_length}"
        print(
            f"{index:>4}  {layout:<12} {_mode(descriptor.packed_hex):<10} "
            f"{descriptor.content.value:<9} {label}".rstrip()
        )
    print()


def _mode(packed_hex: bool) -> str:
    return "packed" if packed_hex else "ascii"
