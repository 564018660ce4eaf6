from mcp_calculator.servers.calculator.server import main

if __name__ == "__main__":
    main()
