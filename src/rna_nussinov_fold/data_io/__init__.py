from rna_nussinov_fold.data_io.excel_export import export_to_excel
from rna_nussinov_fold.data_io.sequence_loader import load_named_sequences, parse_named_sequences

__all__ = [
    "export_to_excel",
    "load_named_sequences",
    "parse_named_sequences",
]
