from weather_mcp.server import main

main()
