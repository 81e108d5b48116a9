from glide_mcp.gateway.app import main

main()
