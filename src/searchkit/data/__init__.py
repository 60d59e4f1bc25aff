"""输入读取与解析。"""
