# backend/geoattend/services/gps_service.py
"""GPS verification service."""
import math

class GPSService:
    """Service for GPS and location verification."""
    
    EARTH_RADIUS_METERS = 6371000
    
    # Maximum distance from the session location that still counts as present
    MAX_DISTANCE_METERS = 50.0
    
    @staticmethod
    def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate haversine distance between two GPS points in meters."""
        R = GPSService.EARTH_RADIUS_METERS
        
        lat1_rad = math.radians(lat1)
        lat2_rad = math.radians(lat2)
        delta_lat = math.radians(lat2 - lat1)
        delta_lon = math.radians(lon2 - lon1)
        
        a = (math.sin(delta_lat/2) ** 2 + 
             math.cos(lat1_rad) * math.cos(lat2_rad) * 
             math.sin(delta_lon/2) ** 2)
        # Rounding can push a just outside [0, 1] near antipodes
        a = min(1.0, max(0.0, a))
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))
        
        return R * c
    
    @staticmethod
    def is_within_geofence(distance: float) -> bool:
        return not distance > GPSService.MAX_DISTANCE_METERS
    
    @staticmethod
    def verify_location(user_lat: float, user_lng: float, session) -> dict:
        """Verify if user is within the geofence around a session."""
        distance = GPSService.calculate_distance(
            user_lat, user_lng,
            session.latitude, session.longitude
        )
        
        return {
            'is_inside': GPSService.is_within_geofence(distance),
            'distance': distance,
            'max_distance': GPSService.MAX_DISTANCE_METERS,
            'session_location': {
                'latitude': session.latitude,
                'longitude': session.longitude
            }
        }
