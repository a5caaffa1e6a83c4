"""
Прикладной слой стойки регистрации.

Содержит репозитории номеров и счетчиков и сервисы, которые координируют
бронирование и выезд гостей.
"""
