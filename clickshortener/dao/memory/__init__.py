from clickshortener.dao.memory.memory_record_storage import MemoryRecordStorage


__all__ = ['MemoryRecordStorage']
