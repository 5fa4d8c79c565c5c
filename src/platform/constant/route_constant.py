# API Route Constants

ROOT = '/'
HEALTH = '/health'
METRICS = '/metrics'

# Room routes
ROOM_BASE = '/rooms'
ROOM_RESERVE = f'{ROOM_BASE}/{{room_id}}'
ROOM_CANCEL = f'{ROOM_BASE}/{{room_id}}/cancel'
