"""
지하철 노선도 관리 및 최단 경로 조회 서비스
"""

__version__ = "1.0.0"
