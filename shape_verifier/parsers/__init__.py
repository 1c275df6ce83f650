from .document_parser import DocumentParser, detect_format
