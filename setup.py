"""
Subway Map Backend - Build Script

역/노선/구간 관리 및 최단 경로 조회 서비스 패키지
"""

from setuptools import setup, find_packages


setup(
    name='subway-map-backend',
    version='1.0.0',
    description='Subway network management and shortest path service',
    long_description='''
    지하철 노선도 관리 서비스. 노선별 구간 등록(사이 구간 분할 포함)과
    삭제(구간 병합 포함)를 일관되게 유지하고, 전체 노선을 하나의 그래프로
    펼쳐 거리 또는 소요시간 기준 최단 경로를 조회한다.
    ''',
    packages=find_packages(include=['subway', 'subway.*']),
    install_requires=[
        'fastapi>=0.100.0,<0.137',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'uvicorn>=0.23.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24',
        ],
    },
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Framework :: FastAPI',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
