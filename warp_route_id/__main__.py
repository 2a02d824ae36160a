from warp_route_id.cli import main

if __name__ == "__main__":
    main()
