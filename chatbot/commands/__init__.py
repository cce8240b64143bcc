"""
Команды бота, сгруппированные по категориям
"""
