"""
RentEase 設定套件
"""
