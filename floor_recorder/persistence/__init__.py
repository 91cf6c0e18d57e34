"""
Persistence - save blob format, batching and file storage.
"""

from .save_data import dataset_to_json, encode_dataset, decode_dataset
from .batcher import SaveBatcher
from .storage import SaveFile
