from .data_type import TypeDescriptor, DecodeRule
from .loader import TypeCatalogLoader, CustomTypeSpec, FieldSpec

__all__ = ["TypeDescriptor",
           "DecodeRule",
           "TypeCatalogLoader",
           "CustomTypeSpec",
           "FieldSpec"]
