from functools import lru_cache

from supabase import Client, create_client

from barberbook.core.config import SUPABASE_KEY, SUPABASE_URL


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """Tạo Supabase client lần đầu được dùng (không cần credentials khi import)"""
    if not SUPABASE_URL or not SUPABASE_KEY:
        raise RuntimeError("Thiếu biến môi trường SUPABASE_URL hoặc SUPABASE_KEY")
    return create_client(SUPABASE_URL, SUPABASE_KEY)
