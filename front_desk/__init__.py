"""
Front Desk: учет номеров, бронирований и ежедневных счетчиков
для стойки регистрации небольшого отеля.
"""
