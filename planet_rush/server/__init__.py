"""HTTP/WebSocket bridge between the simulation and a browser front end."""
