"""FrameSnap DLQ 모니터 Lambda"""
