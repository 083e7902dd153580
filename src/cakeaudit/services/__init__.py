from .compare_db_service import compare_databases
from .compare_fs_service import compare_file_lists
from .convert_service import convert_database

__all__ = ["compare_databases", "compare_file_lists", "convert_database"]
