"""
코어 레이어

상수, 타입, 설정, 로깅 등 외부 서비스와 무관한 공통 모듈.
"""
