"""
方法層級 LRU 緩存工具

模糊比對是整條解析管線中最耗時的步驟（每個未命中的 token 都要掃一次詞庫），
而即時轉錄會在每次更新時整段重新解析，同一個詞會被反覆查詢，因此以緩存加速。

用法：
    from voicebill.utils.cache import cached_method, get_cache_stats

    class LexiconMatcher:
        @cached_method(maxsize=4096)
        def closest(self, word: str, threshold: float):
            ...
"""

from functools import lru_cache, wraps
from typing import Any, Callable, Dict, Optional
import threading


_cache_stats_lock = threading.Lock()
_cache_stats: Dict[str, Dict[str, int]] = {}


def cached_method(maxsize: int = 1024):
    """
    為實例方法添加 LRU 緩存的裝飾器

    與直接使用 functools.lru_cache 不同：
    1. 每個實例擁有獨立的緩存（不同詞庫的 matcher 不會互相污染）
    2. self 不進入緩存 key，實例也不會被全域緩存持有
    3. 依方法名稱彙總命中/未命中統計

    Args:
        maxsize: 每個實例的最大緩存項數量

    範例：
        >>> class Doubler:
        ...     @cached_method(maxsize=100)
        ...     def run(self, x):
        ...         return x * 2
        >>> d = Doubler()
        >>> d.run(5)
        10
        >>> d.run(5)  # 從緩存返回
        10
    """
    def decorator(func: Callable) -> Callable:
        cache_key = f"{func.__module__}.{func.__qualname__}"
        attr_name = f"_cached_{func.__name__}"

        with _cache_stats_lock:
            _cache_stats[cache_key] = {
                "hits": 0,
                "misses": 0,
                "size": 0,
                "maxsize": maxsize,
            }

        def _instance_cache(self) -> Callable:
            cached = self.__dict__.get(attr_name)
            if cached is None:
                bound = func.__get__(self, type(self))
                cached = lru_cache(maxsize=maxsize)(bound)
                self.__dict__[attr_name] = cached
            return cached

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            cached = _instance_cache(self)
            before = cached.cache_info()
            try:
                result = cached(*args, **kwargs)
            except TypeError:
                # 參數不可哈希，直接調用原函數
                with _cache_stats_lock:
                    _cache_stats[cache_key]["misses"] += 1
                return func(self, *args, **kwargs)

            after = cached.cache_info()
            with _cache_stats_lock:
                stats = _cache_stats[cache_key]
                if after.hits > before.hits:
                    stats["hits"] += 1
                else:
                    stats["misses"] += 1
                stats["size"] = after.currsize
            return result

        def cache_clear(self) -> None:
            cached = self.__dict__.get(attr_name)
            if cached is not None:
                cached.cache_clear()

        wrapper.cache_clear = cache_clear
        wrapper.cache_key = cache_key
        return wrapper

    return decorator


def get_cache_stats(method_name: Optional[str] = None) -> Dict[str, Any]:
    """
    獲取緩存統計信息

    Args:
        method_name: 方法名稱片段（如 "closest"），為 None 時返回總覽

    Returns:
        Dict: hits / misses / hit_rate / size / maxsize；
              總覽模式則返回 overall_hit_rate 與各方法明細
    """
    with _cache_stats_lock:
        if method_name:
            matched = {k: v for k, v in _cache_stats.items() if method_name in k}
            if not matched:
                return {}
            hits = sum(s["hits"] for s in matched.values())
            misses = sum(s["misses"] for s in matched.values())
            total = hits + misses
            return {
                "methods": list(matched.keys()),
                "hits": hits,
                "misses": misses,
                "hit_rate": hits / total if total > 0 else 0.0,
                "size": max(s["size"] for s in matched.values()),
                "maxsize": max(s["maxsize"] for s in matched.values()),
            }

        total_hits = sum(s["hits"] for s in _cache_stats.values())
        total_misses = sum(s["misses"] for s in _cache_stats.values())
        total_calls = total_hits + total_misses
        return {
            "overall_hit_rate": total_hits / total_calls if total_calls > 0 else 0.0,
            "total_hits": total_hits,
            "total_misses": total_misses,
            "total_calls": total_calls,
            "methods": {k: dict(v) for k, v in _cache_stats.items()},
        }


def reset_cache_stats() -> None:
    """重置緩存統計（用於測試隔離），不清除緩存內容"""
    with _cache_stats_lock:
        for stats in _cache_stats.values():
            stats["hits"] = 0
            stats["misses"] = 0


def clear_all_caches() -> None:
    """清除所有統計計數與大小紀錄；實例緩存由各實例的 cache_clear() 清除"""
    with _cache_stats_lock:
        for key, stats in _cache_stats.items():
            _cache_stats[key] = {
                "hits": 0,
                "misses": 0,
                "size": 0,
                "maxsize": stats["maxsize"],
            }
