from services.mountain_info import mountain_info_bp

ALL_BLUEPRINTS = [mountain_info_bp]
