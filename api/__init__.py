"""HTTP API сервиса"""
