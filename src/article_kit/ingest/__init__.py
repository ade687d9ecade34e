from .records import ArticleImport, to_import_record, to_import_records

__all__ = [
    "ArticleImport",
    "to_import_record",
    "to_import_records",
]
