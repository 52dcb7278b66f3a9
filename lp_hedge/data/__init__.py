"""
Data layer for LP Delta Hedge

외부에서 주어지는 포지션 범위 데이터 타입 정의
"""

from .types import PriceRange
