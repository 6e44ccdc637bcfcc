from letta_mcp.mcp_server_std import main

if __name__ == "__main__":
    main()
